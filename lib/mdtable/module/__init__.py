import collections
import logging
import mdtable
import mdtable.parser

LOG = logging.getLogger()

DEFAULT_SOURCE = '/proc/mdstat'


class Meta(type):
    @staticmethod
    def wrapper(func):
        def wrapped(self):
            self.clear()
            try:
                func(self)
            except Exception as e:
                mdtable.log_error(e, '%s: update failed' % self.name, self.diag)
                self.rows = []

            LOG.debug('%s: %d rows updated', self.name, len(self.rows))

        return wrapped

    def __new__(cls, name, bases, attrs):
        if 'update' in attrs:
            attrs['update'] = cls.wrapper(attrs['update'])

        return super(Meta, cls).__new__(cls, name, bases, attrs)


class Module(object, metaclass=Meta):
    def __init__(self, conf):
        self.conf = conf
        self.name = conf['name']
        self.diag = mdtable.Diagnostics()
        self.rows = []

    def clear(self):
        self.diag = mdtable.Diagnostics()
        self.rows = []

    def update(self):
        raise NotImplementedError('module is missing update() method')


class TableModule(Module):
    def __init__(self, conf):
        Module.__init__(self, conf)

        if not self.conf.get('table'):
            raise mdtable.MdtableError('%s: no table columns configured' % self.name)

        self.cols = list(self.conf['table'])
        LOG.debug('%s: initialized columns: %s', self.name, ', '.join(self.cols))

    def __iter__(self):
        return self.rows.__iter__()

    def append(self, data):
        self.rows.append([None if data.get(col) is None else str(data[col]) for col in self.cols])

    def records(self):
        return [
            collections.OrderedDict((k, v) for k, v in zip(self.cols, row) if v is not None)
            for row in self.rows
        ]

    def snapshot(self):
        text = mdtable.parser.read_source(self.conf.get('source', DEFAULT_SOURCE), self.diag)
        if text is None:
            return None

        return mdtable.parser.parse_mdstat(text, self.diag)
