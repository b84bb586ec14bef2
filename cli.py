import argparse
import os
import uuid as _uuid

from config.settings import get_settings
from models.errors import PersonValidationError
from pipelines.populate_person import build_demo_pipeline, new_context
from services.clock import clock_from_settings
from services.reporting import format_failure, print_record
from utils.logging_setup import init_logging


def cmd_demo(args):
	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	ctx = new_context(clock_from_settings())
	try:
		build_demo_pipeline().run(ctx)
	except PersonValidationError as err:
		# Fail fast: report which setter rejected its input and stop
		print(format_failure(ctx.meta.get("failed_step", "unknown"), err))
		return
	print_record(ctx.record)


def main():
	settings = get_settings()
	parser = argparse.ArgumentParser(description="Populate a person record with fixed demo inputs")
	parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (default from settings)")
	parser.set_defaults(func=cmd_demo)

	args = parser.parse_args()
	init_logging(args.log_level or settings.log_level)
	args.func(args)


if __name__ == "__main__":
	main()
