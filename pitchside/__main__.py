from pitchside.cli import main

raise SystemExit(main())
