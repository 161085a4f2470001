from vaultexport.main import main

raise SystemExit(main())
