from michishirube.cli import main

main()
