from npm_launcher.main import main

main()
