import sys

from quicksearch.main import main

sys.exit(main())
