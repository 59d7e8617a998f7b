from layoff_tables.pipeline.runner import main

raise SystemExit(main())
