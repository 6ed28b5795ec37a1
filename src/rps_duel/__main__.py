"""Allow `python -m rps_duel`."""

from .cli import main

raise SystemExit(main())
