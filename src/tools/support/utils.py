import os
import sys


def get_our_file_name():
    """
    Returns the name the running tool was invoked as.
    """
    return os.path.basename(sys.argv[0])
