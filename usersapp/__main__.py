from usersapp.cli import main

main()
