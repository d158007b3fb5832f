"""
Firebase Functions entrypoint for the catalog proxy.

Deploy with the functions source pointed at src/; every module-level
https_fn function below becomes an HTTP endpoint.
"""

from firebase_functions.options import set_global_options

from utils.setup_logging import setup_cloud_logging

setup_cloud_logging()

from api.douban.handlers import DoubanHandler  # noqa: E402

set_global_options(max_instances=10)

douban_handler = DoubanHandler()

douban_categories = douban_handler.create_categories_function()
