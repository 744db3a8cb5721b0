import json
import sys

from .consts import PACKAGE_NAME


class _SetEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return json.JSONEncoder.default(self, obj)


class Logger():
    """
    Debug output gated by the `debug` settings flag. Warnings go to stderr
    whether or not debugging is on.
    """
    debug = False
    employer = PACKAGE_NAME

    @classmethod
    def print(cls, *args, **kwargs):
        if cls.debug:
            print(f"{cls.employer}:", *args, **kwargs)

    @classmethod
    def warn(cls, *args):
        print(f"{cls.employer}: WARNING:", *args, file=sys.stderr)

    @classmethod
    def pprint(cls, obj):
        if cls.debug:
            cls.print(json.dumps(
                obj, cls=_SetEncoder, indent=4,
                sort_keys=True, ensure_ascii=False))
