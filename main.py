#!/bin/env python3
import os
import sys

if not os.path.exists("waveform_path"):
    sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from waveform_path.__main__ import main

if __name__ == '__main__':
    sys.exit(main())
