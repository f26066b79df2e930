from fluidstate.cli.main import main

main()
