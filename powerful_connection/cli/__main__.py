from powerful_connection.cli.main import main

raise SystemExit(main())
