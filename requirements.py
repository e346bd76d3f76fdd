# this file is for CI only.
import subprocess
import sys

requires = ['attrs', 'pytest']

if __name__ == '__main__':
    subprocess.check_call([sys.executable, '-m', 'pip', 'install'] + requires)
