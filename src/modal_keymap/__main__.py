import sys

from modal_keymap.cli import main

sys.exit(main())
