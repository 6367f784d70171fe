from dumflite.cli import main

raise SystemExit(main())
