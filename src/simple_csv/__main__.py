"""Allow ``python -m simple_csv``."""

from simple_csv.cli import main

raise SystemExit(main())
