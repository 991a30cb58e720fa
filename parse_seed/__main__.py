from parse_seed.main import main

main()
