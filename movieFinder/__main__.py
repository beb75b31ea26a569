from movieFinder.main import main

main()
