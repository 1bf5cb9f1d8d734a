#!/usr/bin/env python3

import glob

from setuptools import setup
from lib.mdtable import __version__

if __name__ == '__main__':
    confs = {
        '/etc/mdtable':            ['mdtable.yml'],
        '/etc/mdtable/conf.d':     [],
        '/etc/mdtable/examples.d': glob.glob('examples/*.y*ml'),
    }

    setup(
        name='mdtable',
        version=__version__,
        description='linux software raid status tables',
        scripts=['mdtabled.py'],
        packages=['mdtable', 'mdtable.module'],
        package_dir={'mdtable': 'lib/mdtable'},
        data_files=list(confs.items()),
        python_requires='>=3.6',
        install_requires=['PyYAML', 'setuptools'],
        extras_require={'test': ['pytest']},
    )
