import sys

from create_onchain_agent.cli import main

sys.exit(main())
