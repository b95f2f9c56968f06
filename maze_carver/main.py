import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import InvalidDimensions, create_maze

logger = logging.getLogger("maze_carver")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator (randomized DFS)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and save it as an image")
    gen_parser.add_argument("--width", type=int, default=100, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=100, help="Maze Height (cells)")
    gen_parser.add_argument("--out", type=str, default="output.png", help="Output image path (format from extension)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--scale", type=int, default=1, help="Pixels per maze pixel in the output image")
    gen_parser.add_argument("--visual", action="store_true", help="Show carving in a window")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and rendering")
    bench_parser.add_argument("--size", type=int, default=1000, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")
    return parser

def run_generate(parser, args):
    if args.scale < 1:
        parser.error(f"--scale must be at least 1, got {args.scale}")

    # Create Grid (rejects bad sizes before any work is done)
    try:
        grid = create_maze(args.width, args.height)
    except InvalidDimensions as exc:
        parser.error(str(exc))

    logger.info(f"Generating {args.width}x{args.height} maze...")
    from maze_carver.algo.dfs import RecursiveBacktracker

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_carver.viz.preview import PreviewWindow
        generator = RecursiveBacktracker(grid, seed=args.seed, progress_interval=1)
        # Aim for roughly ten seconds of animation at 60 FPS
        steps = max(1, (2 * grid.width * grid.height) // 600)
        window = PreviewWindow(grid, generator=generator, steps_per_frame=steps)
        window.init_window()
        window.run_loop()
    else:
        logger.info("Headless generation...")
        generator = RecursiveBacktracker(grid, seed=args.seed)
        generator.run_all()

    logger.info(f"Carved {generator.carved_count} walls (max stack depth {generator.max_stack_depth}).")

    if args.stats:
        from maze_carver.core.complexity import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    from maze_carver.viz.bitmap import render
    from maze_carver.io.image_writer import save_image
    logger.info(f"Saving image to {args.out}...")
    save_image(render(grid), args.out, scale=args.scale)
    logger.info("Save complete.")
    return grid

def run_benchmark(parser, args):
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.viz.bitmap import render

    try:
        t0 = time.time()
        grid = create_maze(args.size, args.size)
    except InvalidDimensions as exc:
        parser.error(str(exc))
    init_time = time.time() - t0

    t0 = time.time()
    RecursiveBacktracker(grid, seed=args.seed).run_all()
    gen_time = time.time() - t0

    t0 = time.time()
    img = render(grid)
    render_time = time.time() - t0

    cells = grid.width * grid.height
    print(f"\n{'STAGE':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<14}")
    print("-" * 42)
    for name, duration in (("init", init_time), ("generate", gen_time), ("render", render_time)):
        rate = f"{cells / duration:,.0f}" if duration > 0 else "-"
        print(f"{name:<12} | {duration:<10.4f} | {rate:<14}")
    print(f"\nImage: {img.shape[1]}x{img.shape[0]} px")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    
    setup_logging(args.verbose)
    
    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")
    
    if args.command == "generate":
        run_generate(parser, args)
    elif args.command == "benchmark":
        logger.info(f"Running benchmark (Size: {args.size}x{args.size})...")
        run_benchmark(parser, args)

if __name__ == "__main__":
    main()
