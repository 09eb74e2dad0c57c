"""Allow ``python -m gdlookup``."""

from gdlookup.cli.main import main

raise SystemExit(main())
