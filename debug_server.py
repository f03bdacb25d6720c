# Debug status server: answers GET / on $PORT (default 80)
from debug_lib.server.runner import main

if __name__ == "__main__":
    main()
