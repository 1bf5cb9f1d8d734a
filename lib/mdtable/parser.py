import collections
import logging

LOG = logging.getLogger()

PERSONALITIES_KEY = 'Personalities :'
UNUSED_KEY        = 'unused devices:'
METADATA_KEYS     = collections.OrderedDict([
    ('recovery =', 'recovery'),
    ('resync =',   'resync'),
    ('check =',    'check_array'),
    ('bitmap:',    'bitmap'),
])

ARRAY_HEADER   = 'array_header'
UNUSED_TRAILER = 'unused_trailer'
UNRECOGNIZED   = 'unrecognized'

CONFIG_FIELDS = ('usable_size', 'other', 'healthy_drives', 'drive_statuses')

RaidArray = collections.namedtuple('RaidArray', [
    'name',
    'status',
    'raid_level',
    'members',
    'usable_size',
    'other',
    'healthy_drives',
    'drive_statuses',
    'recovery',
    'resync',
    'check_array',
    'bitmap',
])

ProgressInfo  = collections.namedtuple('ProgressInfo',  ['progress', 'finish', 'speed'])
BitmapInfo    = collections.namedtuple('BitmapInfo',    ['on_mem', 'chunk_size', 'external_file'])
MDStatSnapshot = collections.namedtuple('MDStatSnapshot', ['personalities', 'arrays', 'unused'])


def strip_prefix(text, prefix):
    return text[len(prefix):] if text.startswith(prefix) else text

def strip_brackets(text):
    return text[1:-1] if len(text) >= 2 and text[0] == '[' and text[-1] == ']' else text

def read_source(path, diag):
    try:
        with open(path, errors='replace') as f:
            text = f.read()
        LOG.debug('%s: read %d bytes', path, len(text))
        return text
    except (IOError, OSError) as e:
        diag.error('%s: source not available: %s', path, e)
        return None

def normalize(text):
    return [line.strip() for line in text.split('\n') if line.strip()]

def classify(line):
    if line[:2] == 'md':
        return ARRAY_HEADER
    if line[:2] == 'un':
        return UNUSED_TRAILER

    return UNRECOGNIZED

def parse_header(line, diag):
    name, sep, rest = line.partition(':')
    if not sep:
        diag.warning('unexpected md device line structure: %s', line)
        return None

    info = {
        'name':       name.strip(),
        'status':     '',
        'raid_level': '',
        'members':    (),
    }

    part = rest.split()
    if len(part) >= 2:
        info['status']     = part[0]
        info['raid_level'] = part[1]
        info['members']    = tuple(part[2:])
    else:
        diag.warning('md device line missing status or raid level: %s', line)

    return info

def parse_config(line, diag):
    info = dict.fromkeys(CONFIG_FIELDS, '')

    part = line.split()
    if len(part) < 4:
        diag.warning('unexpected md device config: %s', line)
        return info

    info['usable_size']    = '%s %s' % (part[0], part[1])
    info['other']          = ''.join(' %s' % item for item in part[2:-2])
    info['healthy_drives'] = strip_brackets(part[-2])
    info['drive_statuses'] = part[-1]

    return info

def match_metadata(line):
    for key, attr in METADATA_KEYS.items():
        indx = line.find(key)
        if indx != -1:
            return attr, line[indx + len(key):].strip()

    return None, None

def parse_array(lines, n, diag):
    info = parse_header(lines[n], diag)
    if info is None:
        return None, n + 1

    info.update(dict.fromkeys(METADATA_KEYS.values(), ''))

    n += 1
    if n < len(lines):
        info.update(parse_config(lines[n], diag))
        n += 1
    else:
        diag.warning('md device %s has no config line', info['name'])
        info.update(dict.fromkeys(CONFIG_FIELDS, ''))

    while n < len(lines):
        attr, text = match_metadata(lines[n])
        if attr is None:
            break

        LOG.debug('%s: found %s line: %s', info['name'], attr, text)
        info[attr] = text
        n += 1

    return RaidArray(**info), n

def parse_mdstat(text, diag):
    lines = normalize(text or '')
    if not lines:
        diag.warning('source empty')
        return MDStatSnapshot('', (), '')

    n = 0
    personalities = ''
    if lines[0].startswith(PERSONALITIES_KEY):
        personalities = lines[0][len(PERSONALITIES_KEY):].strip()
        n = 1
    else:
        diag.warning('mdstat personalities not found at line 0: %s', lines[0])

    arrays = []
    unused = ''
    while n < len(lines):
        kind = classify(lines[n])

        if kind == ARRAY_HEADER:
            item, n = parse_array(lines, n, diag)
            if item is not None:
                arrays.append(item)
            continue

        if kind == UNUSED_TRAILER:
            unused = strip_prefix(lines[n], UNUSED_KEY).strip()
        else:
            diag.warning('unexpected mdstat line: %s', lines[n])

        n += 1

    LOG.debug('parsed %d md devices', len(arrays))
    return MDStatSnapshot(personalities, tuple(arrays), unused)

def parse_progress(text, diag):
    part = text.split()
    if len(part) != 4:
        diag.warning('unexpected recovery/resync line format: %s', text)
        return None

    return ProgressInfo(
        '%s %s' % (part[0], part[1]),
        strip_prefix(part[2], 'finish='),
        strip_prefix(part[3], 'speed='),
    )

def parse_bitmap(text, diag):
    part = [item.strip() for item in text.split(',')]
    if len(part) < 2:
        diag.warning('unexpected bitmap line structure: %s', text)
        return None

    extra = None
    if len(part) > 2 and part[2].startswith('file:'):
        extra = strip_prefix(part[2], 'file:').strip()

    return BitmapInfo(part[0], part[1], extra)

def parse_slot(member):
    beg = member.find('[')
    end = member.find(']', beg + 1)
    if beg == -1 or end == -1:
        return None

    return member[beg + 1:end]
