from devbox_shell.cli import main

raise SystemExit(main())
