import mdtable.module
import mdtable.parser


class md_devices(mdtable.module.TableModule):
    progress = [
        ('recovery',    'discovery'),
        ('resync',      'resync'),
        ('check_array', 'check_array'),
    ]

    def __init__(self, conf):
        conf['table'] = [
            'device_name',
            'status',
            'raid_level',
            'healthy_drives',
            'usable_size',
            'discovery_progress',
            'discovery_finish',
            'discovery_speed',
            'resync_progress',
            'resync_finish',
            'resync_speed',
            'check_array_progress',
            'check_array_finish',
            'check_array_speed',
            'bitmap_on_mem',
            'bitmap_chunk_size',
            'bitmap_external_file',
            'unused_devices',
        ]

        mdtable.module.TableModule.__init__(self, conf)

    def update(self):
        mds = self.snapshot()
        if mds is None:
            return

        for dev in mds.arrays:
            row = {
                'device_name':    dev.name,
                'status':         dev.status,
                'raid_level':     dev.raid_level,
                'healthy_drives': dev.healthy_drives,
                'usable_size':    dev.usable_size,
                'unused_devices': mds.unused,
            }

            # recovery lands in the discovery_* columns
            for attr, prefix in self.progress:
                if getattr(dev, attr):
                    info = mdtable.parser.parse_progress(getattr(dev, attr), self.diag)
                    if info:
                        row['%s_progress' % prefix] = info.progress
                        row['%s_finish' % prefix]   = info.finish
                        row['%s_speed' % prefix]    = info.speed

            if dev.bitmap:
                info = mdtable.parser.parse_bitmap(dev.bitmap, self.diag)
                if info:
                    row['bitmap_on_mem']        = info.on_mem
                    row['bitmap_chunk_size']    = info.chunk_size
                    row['bitmap_external_file'] = info.external_file

            self.append(row)
