import sys

from todo_tui.app_main import main

if __name__ == "__main__":
    sys.exit(main())
