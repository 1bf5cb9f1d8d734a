import glob
import importlib
import logging
import logging.handlers
import os
import mdtable
import yaml

LOG = logging.getLogger()

DEFAULT_TABLES = ['md_devices', 'md_drives', 'md_personalities']

LOG_FORMAT    = '%(asctime)s.%(msecs)03d - %(filename)16s:%(lineno)-3d %(levelname)8s: %(message)s'
SYSLOG_FORMAT = 'mdtabled[%(process)d]: %(levelname)s: %(message)s'


def log_handler(target):
    if target.startswith('syslog:'):
        addr = '/dev/log' if os.path.exists('/dev/log') else ('localhost', logging.handlers.SYSLOG_UDP_PORT)
        hdlr = logging.handlers.SysLogHandler(address=addr, facility=target.split(':', 1)[-1] or 'daemon')
        hdlr.setFormatter(logging.Formatter(SYSLOG_FORMAT))
    else:
        hdlr = logging.StreamHandler() if target.startswith('console:') else logging.FileHandler(target)
        hdlr.setFormatter(logging.Formatter(LOG_FORMAT, '%Y-%m-%d %H:%M:%S'))

    return hdlr

def create_log(logger=None, debug=False):
    log = logging.getLogger()

    if not (logger or debug):
        log.addHandler(logging.NullHandler())
        return log

    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.addHandler(log_handler(logger or 'console:'))
    log.info('logging started: %s', logger or 'console:')

    return log

def load_yaml(path):
    with open(path) as f:
        return yaml.safe_load(f) or {}

def parse_conf(parser, argv=None):
    try:
        args = parser.parse_args(argv)
        conf = load_yaml(args.cfgfile) if os.path.exists(args.cfgfile) else {}
        conf.setdefault('mdtable_global', {})

        parser.set_defaults(**(conf['mdtable_global']))

        args = parser.parse_args(argv)
        conf['mdtable_global'].update(vars(args))

        create_log(conf['mdtable_global']['logfile'], conf['mdtable_global']['verbose'])
    except (IOError, AttributeError, TypeError, yaml.YAMLError) as e:
        parser.error('cannot parse configuration file: %s' % e)

    tables = {}
    if conf['mdtable_global'].get('include_dir'):
        for item in sorted(glob.glob('%s/*.y*ml' % conf['mdtable_global']['include_dir'])):
            try:
                indx, name = os.path.splitext(os.path.basename(item))[0].split('_', 1)
                if name in tables:
                    raise ValueError('%s: table name already assigned at another index' % name)
                if int(indx) < 1:
                    raise ValueError('%s: invalid table index' % indx)
                if int(indx) in list(v['mdtable_index'] for v in tables.values()):
                    raise ValueError('%s: index already assigned to another table' % indx)

                tables[name] = {
                    'mdtable_index': int(indx),
                    'source':        conf['mdtable_global']['source'],
                }
                tables[name].update(load_yaml(item))
                tables[name]['name'] = name

                if 'module' not in tables[name]:
                    raise ValueError('%s: no module configured' % name)
            except (IOError, ValueError, TypeError, yaml.YAMLError) as e:
                parser.error('cannot parse configuration file: %s' % e)

    if not tables:
        for indx, name in enumerate(DEFAULT_TABLES, 1):
            tables[name] = {
                'name':          name,
                'module':        name,
                'mdtable_index': indx,
                'source':        conf['mdtable_global']['source'],
            }
        LOG.debug('no table configuration found, using defaults: %s', ', '.join(DEFAULT_TABLES))

    conf['mdtable_tables'] = tables
    return conf

def create_module(conf):
    base = conf['module']
    full = 'mdtable.module.%s' % base

    try:
        kind = getattr(importlib.import_module(full), base)
    except (ImportError, AttributeError) as e:
        raise mdtable.MdtableError('%s: unknown module %s: %s' % (conf['name'], base, e))

    LOG.debug('created table %s instance of %s', conf['name'], full)
    return kind(dict(conf))

def create_modules(conf):
    mods = []
    for name, item in sorted(conf['mdtable_tables'].items(), key=lambda x: x[1]['mdtable_index']):
        mods.append(create_module(item))

    LOG.info('configured %d tables: %s', len(mods), ', '.join(m.name for m in mods))
    return mods
