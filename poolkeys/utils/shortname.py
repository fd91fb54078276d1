import logging

PACKAGE = "poolkeys"


class ShortNameFilter(logging.Filter):
    """Set ``%(shortname)s``: the logger name without the poolkeys/sources prefix.

    poolkeys.sources.explorer.client -> explorer-client
    poolkeys.main                    -> main
    urllib3.connectionpool           -> urllib3-connectionpool
    """

    def filter(self, record):
        path = record.name.split(".")
        if path[0] == PACKAGE:
            path = path[1:] or path
            if path[0] == "sources" and len(path) > 1:
                path = path[1:]
        record.shortname = "-".join(path)
        return True
