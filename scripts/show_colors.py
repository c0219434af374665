"""Print one line per severity so the default colours can be checked by eye."""

from simple_logger import create_logger


def main() -> None:
    logger = create_logger(prefix=None)
    logger.log('Logger "log" test')

    logger_with_prefix = create_logger(prefix="Awesome logger")
    logger_with_prefix.debug('Logger "debug" test')
    logger_with_prefix.error('Logger "error" test')
    logger_with_prefix.group('Logger "group" test')
    logger_with_prefix.info('Logger "info" test')
    logger_with_prefix.group_end('Logger "group_end" test')
    logger_with_prefix.log('Logger "log" test')
    logger_with_prefix.warn('Logger "warn" test')


if __name__ == "__main__":
    main()
