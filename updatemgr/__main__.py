from updatemgr.cli.app import main

main()
