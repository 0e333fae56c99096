from vibe.run import main

raise SystemExit(main())
