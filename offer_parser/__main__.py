from loguru import logger

from offer_parser.main import cli

if __name__ == "__main__":
    try:
        cli(prog_name="offer-parser")
    except KeyboardInterrupt:
        logger.info("Interrupted")
