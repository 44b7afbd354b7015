import sys

from answerbot.main import main

sys.exit(main())
