from um32.runtime.emulator import main

main()
