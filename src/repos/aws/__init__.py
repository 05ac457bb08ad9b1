#
# Name of the string hash key in every table
#
KEY_ATTRIBUTE = 'id'
