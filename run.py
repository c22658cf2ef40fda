"""
Entry Point Script (Bootstrap)
==============================
Runs the converter straight from a source checkout.

It sits outside the 'src' package and puts 'src' on 'sys.path' so that
'from csvtoply...' resolves without installing the project.

Usage:
    $ python run.py [OPTIONS]+ input.csv output.ply
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from csvtoply.main import main

if __name__ == "__main__":
    sys.exit(main())
