from gfsync.scripts import main

main()
