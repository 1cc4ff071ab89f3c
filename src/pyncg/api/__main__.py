"""Allow running with: python -m pyncg.api"""
from pyncg.api.api_server import main

raise SystemExit(main())
