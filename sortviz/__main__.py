from sortviz.main import main

main()
