import sys

from note_ocr.main import main

sys.exit(main())
