from chessmoves.app import main

main()
