import logging
import os
import traceback

LOG = logging.getLogger()

__version__ = '1.0.0'


class MdtableError(Exception): pass


class Diagnostics(object):
    levels = {
        'warning': logging.WARNING,
        'error':   logging.ERROR,
    }

    def __init__(self):
        self.items = []

    def __iter__(self):
        return self.items.__iter__()

    def __len__(self):
        return len(self.items)

    def add(self, prio, text, *args):
        if args:
            text = text % args

        self.items.append((prio, text))
        LOG.log(self.levels.get(prio, logging.WARNING), text)

    def warning(self, text, *args):
        self.add('warning', text, *args)

    def error(self, text, *args):
        self.add('error', text, *args)

    def messages(self, prio=None):
        return [text for kind, text in self.items if prio is None or kind == prio]


def log_error(e, msg=None, diag=None):
    text = '%s: %s' % (msg, e) if msg else str(e)
    if diag is not None:
        diag.error(text)
    else:
        LOG.error(text)

    for line in traceback.format_exc().split('\n'):
        LOG.debug('  %s', line)

def log_fatal(item, prio='error', exit=1):
    if isinstance(item, Exception):
        log_error(item)
    else:
        getattr(LOG, prio, LOG.error)(item)

    if exit is not None:
        os._exit(exit)
