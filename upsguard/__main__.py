from upsguard.cli.main import main

main()
