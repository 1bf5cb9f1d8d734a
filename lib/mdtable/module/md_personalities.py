import mdtable.module


class md_personalities(mdtable.module.TableModule):
    def __init__(self, conf):
        conf['table'] = [
            'name',
        ]

        mdtable.module.TableModule.__init__(self, conf)

    def update(self):
        mds = self.snapshot()
        if mds is None:
            return

        for item in mds.personalities.split():
            if not (len(item) > 2 and item.startswith('[') and item.endswith(']')):
                self.diag.warning('unexpected personality format: %s', item)
                continue

            self.append({'name': item[1:-1]})
