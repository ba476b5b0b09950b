import argparse
import time

from streamfilter import ExponentialFilter, MovingAverageFilter, FilterError
from streamfilter.config import get_demo_settings, print_config_info

def parse_args():
    parser = argparse.ArgumentParser(description='ストリーミングフィルターのデモ')
    parser.add_argument('--mode', choices=['console', 'basic', 'highlowpass', 'multi'], default='console',
                        help='実行モード (default: console)')
    parser.add_argument('--samples', type=int, default=None,
                        help='処理するサンプル数 (default: 設定値, consoleモードは100)')
    parser.add_argument('--output', default=None,
                        help='グラフの保存先 (basic/highlowpass/multi モード)')
    parser.add_argument('--seed', type=int, default=None,
                        help='乱数シード')
    parser.add_argument('--interval', type=float, default=0.0,
                        help='consoleモードでのサンプル間隔 [s] (default: 0)')
    parser.add_argument('--show-config', action='store_true',
                        help='設定情報を表示')
    return parser.parse_args()

def run_console_mode(samples=100, interval=0.0, value=1.0):
    """
    一定入力を1サンプルずつ移動平均・指数フィルターに通して表示

    Returns:
        list: (移動平均出力, 指数フィルター出力) のリスト
    """
    moving_average = MovingAverageFilter(100)
    exponential = ExponentialFilter(0.1)

    outputs = []
    for _ in range(samples):
        out_m = moving_average.filter(value)
        out_e = exponential.filter(value)
        outputs.append((out_m, out_e))
        print(f"MovingAverage: {out_m:.6f} Exponential: {out_e:.6f}")
        if interval > 0:
            time.sleep(interval)
    return outputs

def main():
    args = parse_args()

    if args.show_config:
        print_config_info()

    if args.samples is not None and args.samples < 1:
        print(f"エラー: サンプル数は1以上を指定してください ({args.samples})")
        return

    try:
        if args.mode == 'console':
            run_console_mode(args.samples or 100, args.interval)
        else:
            # グラフ描画はmatplotlibが必要なモードでのみ読み込む
            from visualize_filters import visualize_basic, visualize_high_low_pass, visualize_multi_stream

            samples = args.samples or get_demo_settings()['samples']
            if args.mode == 'basic':
                visualize_basic(samples, args.output or 'basic.png', args.seed)
            elif args.mode == 'highlowpass':
                visualize_high_low_pass(samples, args.output or 'highlowpass.png', args.seed)
            elif args.mode == 'multi':
                visualize_multi_stream(samples, args.output or 'multi.png', args.seed)
    except KeyboardInterrupt:
        print("\n⚠️ ユーザーによって中断されました")
    except FilterError as e:
        print(f"\n⚠️ フィルターの設定エラー: {e}")

if __name__ == "__main__":
    main()
