from psprofile.run_server import main

main()
