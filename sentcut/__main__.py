from sentcut.cli import main

main()
