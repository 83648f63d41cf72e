import sys

from git_repo_info.cli import main

sys.exit(main())
