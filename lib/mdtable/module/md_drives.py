import mdtable.module
import mdtable.parser


class md_drives(mdtable.module.TableModule):
    def __init__(self, conf):
        conf['table'] = [
            'md_device_name',
            'drive_name',
            'status',
        ]

        mdtable.module.TableModule.__init__(self, conf)

    def drive_status(self, dev, slot):
        try:
            indx = int(slot)
        except ValueError:
            self.diag.warning('%s: unexpected drive number: %s', dev.name, slot)
            return None

        stat = dev.drive_statuses
        if not (stat.startswith('[') and stat.endswith(']')):
            self.diag.warning('%s: unexpected drive status format: %s', dev.name, stat)
            return None
        if not 0 <= indx < len(stat) - 2:
            self.diag.warning('%s: drive number is out of range: got %d, expected max %d', dev.name, indx, len(stat) - 3)
            return None

        return '1' if stat[indx + 1] == 'U' else '0'

    def update(self):
        mds = self.snapshot()
        if mds is None:
            return

        for dev in mds.arrays:
            for drive in dev.members:
                slot = mdtable.parser.parse_slot(drive)
                if slot is None:
                    self.diag.warning('%s: unexpected device name format: %s', dev.name, drive)
                    continue

                self.append({
                    'md_device_name': dev.name,
                    'drive_name':     drive,
                    'status':         self.drive_status(dev, slot),
                })
