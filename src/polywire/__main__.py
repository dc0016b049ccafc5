from polywire.api.cli import main

raise SystemExit(main())
