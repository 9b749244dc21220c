from .generate_types import main

raise SystemExit(main())
