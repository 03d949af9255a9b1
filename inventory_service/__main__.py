import sys

from inventory_service.cli import main

sys.exit(main())
