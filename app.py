#!/usr/bin/env python3
import os
import sys
from galshelf import create_app, default_data_dir, BIND, PORT

def _resolve_data_dir() -> str:
    if len(sys.argv) >= 2:
        return os.path.abspath(sys.argv[1])
    return os.path.abspath(default_data_dir())

def main() -> None:
    app = create_app(_resolve_data_dir())
    app.run(host=BIND, port=PORT, debug=False)

if __name__ == "__main__":
    main()
