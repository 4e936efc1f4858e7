#!/usr/bin/env python3
"""panelcut 명령 진입점"""

import sys

from .logging_setup import setup_logging


def main(argv=None):
    """panelcut [web] [--debug]

    인자가 없으면 대화형 재단 계획, web이면 API 서버를 띄운다.
    --debug는 엔진 로그를 DEBUG 레벨로 출력한다.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    debug = "--debug" in args
    if debug:
        args.remove("--debug")

    if args[:1] == ["web"]:
        from .web import run_server
        run_server(log_level="DEBUG" if debug else "INFO")
        return

    setup_logging("DEBUG" if debug else "WARNING")
    from .interactive import run_interactive
    run_interactive()


if __name__ == "__main__":
    main()
