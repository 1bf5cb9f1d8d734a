import http.server

import collections
import json
import logging
import re
import signal
import traceback
import urllib.parse

from mdtable import log_error, __version__

LOG = logging.getLogger()

ROUTES = collections.OrderedDict()


class HTTPError(Exception):
    code = 500

    def __init__(self, text=None):
        Exception.__init__(self, text)
        self.text = text or '%s\n' % http.server.BaseHTTPRequestHandler.responses[self.code][0]

class HTTPNotFoundError(HTTPError):
    code = 404


class Server(http.server.HTTPServer):
    allow_reuse_address = True

    def __init__(self, port, tables, addr=''):
        http.server.HTTPServer.__init__(self, (addr, port), Handler)
        self.tables = collections.OrderedDict((mod.name, mod) for mod in tables)

        try:
            LOG.info('serving %d tables on port %d', len(self.tables), port)
            self.serve_forever()
        except KeyboardInterrupt:
            LOG.info('stopping mdtable httpd')

    def process_request(self, *args):
        def handle_timeout(*args):
            raise RuntimeError('request timed out')

        try:
            signal.signal(signal.SIGALRM, handle_timeout)
            signal.alarm(10)

            http.server.HTTPServer.process_request(self, *args)
        except Exception as e:
            log_error(e)
        finally:
            signal.alarm(0)


class Handler(http.server.BaseHTTPRequestHandler):
    protocol_version = 'HTTP/1.1'
    server_version   = 'mdtable/%s' % __version__

    def log_message(self, fmt, *args):
        LOG.debug('%s: %s', self.address_string(), fmt % args)

    def do_GET(self):
        code, kind, text = dispatch(self.server.tables, self.path)
        body = text.encode('utf-8')

        self.send_response(code)
        self.send_header('Connection', 'close')
        self.send_header('Content-type', kind)
        self.send_header('Content-length', len(body))
        self.end_headers()
        self.wfile.write(body)


def GET(path=None):
    def wrapper(func):
        patt = r'/%s(?:/|$)' % (path.strip('/') if path is not None else func.__name__)
        ROUTES[re.compile(patt)] = func
        return func
    return wrapper

def dispatch(tables, path):
    url   = urllib.parse.urlparse(path)
    query = urllib.parse.parse_qs(url.query)

    try:
        for patt, func in ROUTES.items():
            find = patt.match(urllib.parse.unquote(url.path))
            if find:
                kind, text = func(tables, query, *find.groups())
                return 200, kind, text

        raise HTTPNotFoundError
    except HTTPError as e:
        return e.code, 'text/plain', e.text
    except Exception as e:
        log_error(e, 'GET %s' % path)
        return 500, 'text/plain', traceback.format_exc()

def render_text(mod):
    text = '\t'.join(mod.cols) + '\n'
    for row in mod:
        text += '\t'.join('' if val is None else val for val in row) + '\n'

    return text

def render_json(mod):
    return json.dumps(mod.records(), indent=2) + '\n'


@GET()
def version(tables, query):
    return 'text/plain', Handler.server_version + '\n'

@GET()
def tables(tables, query):
    return 'text/plain', ''.join('%s\n' % name for name in tables)

@GET(r'table/([\w-]+)')
def table(tables, query, name):
    if name not in tables:
        raise HTTPNotFoundError('no such table: %s\n' % name)

    mod = tables[name]
    mod.update()

    if query.get('format', ['text'])[-1] == 'json':
        return 'application/json', render_json(mod)

    return 'text/plain', render_text(mod)
