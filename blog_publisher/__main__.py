import sys

from blog_publisher.cli import main

sys.exit(main())
