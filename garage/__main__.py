from garage.app import main


raise SystemExit(main())
