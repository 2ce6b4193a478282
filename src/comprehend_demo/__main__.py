"""Allow ``python -m comprehend_demo``."""

from comprehend_demo.cli import main

raise SystemExit(main())
