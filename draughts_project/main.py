#!/usr/bin/env python3
"""
Draughts Project 主入口文件

提供命令行接口: 创建棋局、按坐标记法走棋并显示棋盘。
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from draughts_project import __version__, __description__
from draughts_project.src.draughts_engine.config import ConfigManager, GameConfig, SystemConfig
from draughts_project.src.draughts_engine.rules_engine import (
    Color, DraughtsGame, MoveExecutor, RuleEngine, parse_move_notation
)
from draughts_project.src.draughts_engine.rules_engine.move import column_to_letters
from draughts_project.src.draughts_engine.utils import setup_logger, DraughtsError

console = Console()

PIECE_STYLES = {
    0: ("", ""),
    1: ("●", "bold red"),
    3: ("♛", "bold red"),
    5: ("●", "bold white"),
    7: ("♛", "bold white"),
}


def render_board(game: DraughtsGame) -> Table:
    """把棋盘渲染为 rich 表格，列用字母、行用数字标注"""
    table = Table(show_lines=True, title=f"当前玩家: {'白方' if game.current_player is Color.WHITE else '黑方'}")
    table.add_column("", justify="right", style="dim")
    for x in range(game.xsize):
        table.add_column(column_to_letters(x), justify="center")

    for y in range(game.ysize):
        cells = []
        for x in range(game.xsize):
            symbol, style = PIECE_STYLES[game.get_piece_value((x, y))]
            background = "on grey23" if (x + y) % 2 else "on grey54"
            cells.append(Text(symbol or " ", style=f"{style} {background}".strip()))
        table.add_row(str(y), *cells)
    return table


def load_configs(config_dir: Optional[str]) -> Tuple[GameConfig, SystemConfig]:
    if not config_dir:
        return GameConfig(), SystemConfig()
    manager = ConfigManager(config_dir)
    return manager.get_game_config(), manager.get_system_config()


@click.group()
@click.version_option(version=__version__, prog_name="Draughts Project")
@click.option('--config', 'config_dir', type=click.Path(file_okay=False), help='配置目录')
@click.option('--debug', is_flag=True, help='启用调试日志')
@click.pass_context
def cli(ctx: click.Context, config_dir: Optional[str], debug: bool):
    """国际跳棋规则引擎"""
    game_config, system_config = load_configs(config_dir)
    setup_logger(
        name='draughts',
        level='DEBUG' if debug else system_config.log_level,
        log_file=system_config.log_file or None,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count
    )
    ctx.obj = game_config


@cli.command()
@click.option('--xsize', type=int, help='棋盘列数')
@click.option('--ysize', type=int, help='棋盘行数')
@click.pass_obj
def new(game_config: GameConfig, xsize: Optional[int], ysize: Optional[int]):
    """显示初始局面"""
    game = DraughtsGame(xsize or game_config.xsize, ysize or game_config.ysize)
    console.print(render_board(game))


@cli.command()
@click.argument('moves', nargs=-1)
@click.option('--xsize', type=int, help='棋盘列数')
@click.option('--ysize', type=int, help='棋盘行数')
@click.option('--undo', type=int, default=0, help='走完后撤销的步数')
@click.pass_obj
def play(game_config: GameConfig, moves: Tuple[str, ...], xsize: Optional[int],
         ysize: Optional[int], undo: int):
    """从初始局面依次执行走法，如 b6-a5 c3xe5"""
    game = DraughtsGame(xsize or game_config.xsize, ysize or game_config.ysize)
    executor = MoveExecutor(RuleEngine(men_capture_backward=game_config.men_capture_backward))

    for notation in moves:
        move = executor.apply_move(game, parse_move_notation(notation))
        console.print(f"[green]{move.player.name.lower()}: {move.to_notation()}[/green]")

    for _ in range(undo):
        move = executor.undo_last_move(game)
        console.print(f"[yellow]撤销: {move.to_notation()}[/yellow]")

    console.print(render_board(game))


@cli.command()
def info():
    """显示系统信息"""
    banner_text = Text()
    banner_text.append("Draughts Project\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")
    console.print(Panel(banner_text, title="国际跳棋规则引擎", border_style="blue", padding=(1, 2)))


def main():
    """主入口函数"""
    try:
        cli(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)
    except (DraughtsError, ValueError) as e:
        console.print(f"[red]错误: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
