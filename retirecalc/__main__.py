from retirecalc.cli import main

main()
