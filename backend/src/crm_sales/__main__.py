"""Allow ``python -m crm_sales`` to run the demonstration scenario."""

from crm_sales.main import main

raise SystemExit(main())
