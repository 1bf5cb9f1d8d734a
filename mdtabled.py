#!/usr/bin/env python3

import argparse
import logging
import mdtable
import mdtable.httpd
import mdtable.util
import sys

LOG = logging.getLogger()


def print_tables(mods, names, json_out=False, out=None):
    out = out or sys.stdout
    for name in names:
        mod = [m for m in mods if m.name == name][0]
        mod.update()

        if json_out:
            out.write(mdtable.httpd.render_json(mod))
        else:
            out.write(mdtable.httpd.render_text(mod))

        LOG.info('%s: printed %d rows, %d diagnostics', name, len(mod.rows), len(mod.diag))

def create_parser():
    parser = argparse.ArgumentParser(description='linux software raid status tables')
    parser.add_argument('-f', '--cfgfile', default='/etc/mdtable/mdtable.yml',
                        help='mdtable configuration file')
    parser.add_argument('-l', '--logfile', default=None,
                        help='log destination: console:, syslog:<facility>, or file path')
    parser.add_argument('-v', '--verbose', default=False, action='store_true',
                        help='enable debug logging')
    parser.add_argument('-s', '--source', default='/proc/mdstat',
                        help='md status source file')
    parser.add_argument('-i', '--include-dir', default=None, dest='include_dir',
                        help='directory of per-table configuration files')
    parser.add_argument('-p', '--httpd-port', default=1123, type=int, dest='httpd_port',
                        help='http server listening port')
    parser.add_argument('-j', '--json', default=False, action='store_true',
                        help='print tables as json')
    parser.add_argument('tables', nargs='*',
                        help='print these tables and exit instead of serving')

    return parser

def main(argv=None):
    parser = create_parser()

    conf = mdtable.util.parse_conf(parser, argv)
    args = conf['mdtable_global']

    try:
        mods = mdtable.util.create_modules(conf)
    except mdtable.MdtableError as e:
        parser.error(str(e))

    unknown = [name for name in args['tables'] if name not in [m.name for m in mods]]
    if unknown:
        parser.error('unknown table: %s' % ', '.join(unknown))

    if args['tables']:
        print_tables(mods, args['tables'], args['json'])
        return 0

    try:
        mdtable.httpd.Server(args['httpd_port'], tables=mods)
    except Exception as e:
        mdtable.log_fatal(e)

    return 0

if __name__ == '__main__':
    sys.exit(main())
