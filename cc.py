#!/usr/bin/env python3

import sys

import scriptc.driver


if __name__ == '__main__':
    sys.exit(scriptc.driver.main(sys.argv[0], sys.argv[1:]))
