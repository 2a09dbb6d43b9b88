import sys

from ffmpeg_batch.cli import main

sys.exit(main())
