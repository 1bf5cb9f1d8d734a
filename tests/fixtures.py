RESYNC = """Personalities : [raid1]
md0 : active raid1 sdb1[1] sda1[0]
      1953514496 blocks super 1.2 [2/2] [UU]
      [===>.................]  resync = 15.5% (303746432/1953514496) finish=115.2min speed=162033K/sec

unused devices: <none>
"""

MULTIPLE = """Personalities : [raid1] [raid0] [linear] [multipath] [raid6] [raid5] [raid4] [raid10]
md125 : active (auto-read-only) raid1 sdb1[1] sda1[0]
      499968 blocks super 1.0 [2/2] [UU]
      bitmap: 0/1 pages [0KB], 65536KB chunk

md126 : active raid0 sda3[0] sdb3[1]
      15761408 blocks super 1.2 512k chunks

md127 : active raid5 sdd1[3] sdc1[1] sdb2[0]
      3906764800 blocks super 1.2 level 5, 512k chunk, algorithm 2 [3/2] [UU_]
      [=>...................]  recovery =  8.4% (164198528/1953382400) finish=160.1min speed=186203K/sec
      bitmap: 2/15 pages [8KB], 65536KB chunk, file: /var/lib/md127.bitmap

unused devices: sde1 sdf1
"""

CHECK = """Personalities : [raid6] [raid5] [raid4]
md2 : active raid6 sde[4] sdd[3] sdc[2] sdb[1] sda[0]
      8790405120 blocks super 1.2 level 6, 512k chunk, algorithm 2 [5/5] [UUUUU]
      [==========>..........]  check = 52.3% (1532562432/2930135040) finish=98.7min speed=235928K/sec
      bitmap: 0/22 pages [0KB], 65536KB chunk

unused devices: <none>
"""
