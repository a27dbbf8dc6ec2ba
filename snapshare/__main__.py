from snapshare.main import run

run()
