from xbparams.cli import main

main()
