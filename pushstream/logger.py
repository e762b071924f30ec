import logging


__super = logging.getLogger('pushstream')


def debug(message, **kwargs):
    v = {'message': message, **kwargs}
    __super.debug(v)
