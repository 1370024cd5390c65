"""Risk monitor entrypoint.

Periodically assesses the newest reading against its predecessor and
reports risk level transitions.

Usage: python -m glof.monitor
"""

from glof.monitor.service import main

if __name__ == "__main__":
    main()
