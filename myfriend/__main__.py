from myfriend.app import main

main()
