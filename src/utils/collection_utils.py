from typing import Any, Collection


def to_collection(thing: Any) -> Collection:
    """
    Ensure the given thing is a collection and return one if it is not.

    :param thing: the thing
    :return: the thing as a collection
    """
    if thing is not None:
        if not isinstance(thing, Collection):
            return (thing,)
        if len(thing) == 0:
            return None
    return thing
