import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_merge' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_merge.config import ALGORITHMS, DEFAULT_LOG_FILE, ConfigError, MazeConfig, Mode


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Merge: randomized Kruskal maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a batch of mazes")
    gen_parser.add_argument("size", help="Side length (odd, greater than 4)")
    gen_parser.add_argument("count", help="Number of mazes")
    gen_parser.add_argument("mode", help="compact (c), compact-stepped (cs), verbose (v) or log-to-file (p)")
    gen_parser.add_argument("--out", type=str, default=DEFAULT_LOG_FILE, help="Target file for log-to-file mode")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--algo", type=str, default="scan", choices=ALGORITHMS, help="Merge engine")
    gen_parser.add_argument("--delay", type=float, default=None,
                            help="Seconds to wait between stepped frames instead of reading a key")

    # View Command
    view_parser = subparsers.add_parser("view", help="Animate one generation in a window")
    view_parser.add_argument("size", help="Side length (odd, greater than 4)")
    view_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    view_parser.add_argument("--algo", type=str, default="scan", choices=ALGORITHMS, help="Merge engine")
    view_parser.add_argument("--steps-per-frame", type=int, default=1, help="Walls tested per frame")
    view_parser.add_argument("--record", action="store_true", help="Record generation video")
    view_parser.add_argument("--record-file", type=str, default=None, help="Video output path")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time both merge engines")
    bench_parser.add_argument("--size", type=int, default=51, help="Benchmark size")
    bench_parser.add_argument("--count", type=int, default=10, help="Mazes per engine")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def generate(args, parser, logger) -> int:
    try:
        config = MazeConfig.from_args(
            [args.size, args.count, args.mode],
            out=args.out, seed=args.seed, algo=args.algo, delay=args.delay,
        )
    except ConfigError as e:
        parser.error(str(e))

    from maze_merge.batch import BatchDriver
    try:
        report = BatchDriver(config).run()
    except OSError as e:
        logger.error(f"I/O failure: {e}")
        return 1

    for line in report.lines():
        print(line)
    return 0


def view(args, parser, logger) -> int:
    try:
        config = MazeConfig.from_args([args.size, "1", Mode.COMPACT.value], seed=args.seed, algo=args.algo)
    except ConfigError as e:
        parser.error(str(e))

    import random
    from maze_merge.algo.walls import prepare
    from maze_merge.batch import make_generator
    from maze_merge.viz.renderer import Renderer

    grid, walls = prepare(config.size)
    generator = make_generator(config.algo, grid, walls, random.Random(config.seed))

    logger.info("Visual mode enabled - Opening window...")
    renderer = Renderer(grid, generator=generator, steps_per_frame=args.steps_per_frame,
                        record=args.record, output_file=args.record_file)
    renderer.init_window()
    renderer.run_loop()
    return 0


def benchmark(args, parser, logger) -> int:
    import io
    from maze_merge.batch import BatchDriver

    logger.info(f"Running merge engine benchmark (Size: {args.size}x{args.size}, Count: {args.count})...")

    print(f"\n{'ENGINE':<12} | {'TIME (ms)':<10} | {'PER MAZE (ms)':<14}")
    print("-" * 42)
    for algo in ALGORITHMS:
        try:
            config = MazeConfig(size=args.size, count=args.count, mode=Mode.COMPACT,
                                seed=args.seed, algo=algo)
            report = BatchDriver(config, stdout=io.StringIO()).run()
        except ConfigError as e:
            parser.error(str(e))
        per_maze = report.elapsed_ms / report.count
        print(f"{algo:<12} | {report.elapsed_ms:<10} | {per_maze:<14.2f}")
    return 0


COMMANDS = {
    "generate": generate,
    "view": view,
    "benchmark": benchmark,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_merge")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")
    return COMMANDS[args.command](args, parser, logger)


if __name__ == "__main__":
    sys.exit(main())
