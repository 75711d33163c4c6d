from hindley.cmdline import main

main()
