from functools import wraps
import logging


class CalcError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that turns any failure on user input into a CalcError.

    Passes through CalcErrors. The original exception is kept as the second
    argument.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def get_logger(name):
    '''
    Logger for a module of this package.

    All of them share one handler, writing bare "LEVEL: message" lines to
    stderr, on the package logger. Set the package logger's level to change
    them all at once.
    '''
    package = logging.getLogger(__package__)
    if not package.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        package.addHandler(handler)
        package.setLevel(logging.INFO)
    return logging.getLogger(name)
