from syncdash.cli import main

main()
