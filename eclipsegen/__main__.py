from eclipsegen.runner import main

main()
