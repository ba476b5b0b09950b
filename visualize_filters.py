"""
フィルター出力の可視化スクリプト
ノイズを含む正弦波を1サンプルずつフィルターに通し、結果をグラフに保存
"""
import sys

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from streamfilter import (
    ExponentialFilter,
    LowPassFilter,
    HighPassFilter,
    MovingAverageFilter,
    MultiStreamFilter,
)
from streamfilter.config import get_demo_settings


def generate_noisy_signal(n, frequency=2.0, phase_fn=np.sin, noise_std=None, seed=None):
    """
    ガウスノイズを加えた周期信号を生成

    Args:
        n: サンプル数
        frequency: 周期係数（period_samples あたりの半周期数）
        phase_fn: np.sin または np.cos
        noise_std: ノイズの標準偏差（Noneなら設定値）
        seed: 乱数シード（Noneなら設定値）

    Returns:
        tuple: (サンプル番号, 信号)
    """
    settings = get_demo_settings()
    if noise_std is None:
        noise_std = settings['noise_std']
    if seed is None:
        seed = settings['seed']

    rng = np.random.default_rng(seed)
    x = np.arange(n)
    y = phase_fn(frequency * np.pi * x / settings['period_samples']) + rng.normal(0.0, noise_std, n)
    return x, y


def visualize_basic(n=None, output_path='basic.png', seed=None):
    """
    移動平均フィルターと指数フィルターの出力を比較

    Args:
        n: サンプル数
        output_path: 画像の保存先
        seed: 乱数シード

    Returns:
        dict: 入力と各フィルターの出力
    """
    settings = get_demo_settings()
    n = n or settings['samples']
    x, y = generate_noisy_signal(n, seed=seed)

    moving_average = MovingAverageFilter(settings['basic_window_size'])
    exponential = ExponentialFilter(settings['basic_alpha'])

    y_m = np.empty(n)
    y_e = np.empty(n)
    for i, sample in enumerate(y):
        y_m[i] = moving_average.filter(sample)
        y_e[i] = exponential.filter(sample)

    plt.figure(figsize=settings['figure_size'])
    plt.plot(x, y, label='True')
    plt.plot(x, y_e, '--', label='Exp.')
    plt.plot(x, y_m, '--', label='MAvg.')
    plt.xlim(0, n)
    plt.title('Filtering Example')
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    plt.savefig(output_path, dpi=settings['dpi'])
    plt.close()
    print(f"[INFO] グラフを保存しました: {output_path}")

    return {'x': x, 'input': y, 'moving_average': y_m, 'exponential': y_e}


def visualize_high_low_pass(n=None, output_path='highlowpass.png', seed=None):
    """
    ローパス・ハイパスフィルターの出力を比較

    Args:
        n: サンプル数
        output_path: 画像の保存先
        seed: 乱数シード

    Returns:
        dict: 入力と各フィルターの出力
    """
    settings = get_demo_settings()
    n = n or settings['samples']
    x, y = generate_noisy_signal(n, frequency=settings['highlowpass_frequency'], seed=seed)

    lp = LowPassFilter(rc=0.1, dt=0.01)
    hp = HighPassFilter(rc=0.1, dt=0.01)

    # 1サンプルずつ到着するものとして処理
    y_l = np.empty(n)
    y_h = np.empty(n)
    for i, sample in enumerate(y):
        y_l[i] = lp.filter(sample)
        y_h[i] = hp.filter(sample)

    plt.figure(figsize=settings['figure_size'])
    plt.plot(x, y, label='True')
    plt.plot(x, y_h, '--', label='HighPass')
    plt.plot(x, y_l, '--', label='LowPass')
    plt.xlim(0, n)
    plt.title('Filtering Example')
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    plt.savefig(output_path, dpi=settings['dpi'])
    plt.close()
    print(f"[INFO] グラフを保存しました: {output_path}")

    return {'x': x, 'input': y, 'low_pass': y_l, 'high_pass': y_h}


def visualize_multi_stream(n=None, output_path='multi.png', seed=None):
    """
    2チャンネル（sin, cos）のデータを移動平均マルチストリームフィルターで平滑化

    Args:
        n: サンプル数
        output_path: 画像の保存先
        seed: 乱数シード

    Returns:
        dict: 入力と各チャンネルの出力
    """
    settings = get_demo_settings()
    n = n or settings['samples']
    seed = settings['seed'] if seed is None else seed
    x, y = generate_noisy_signal(n, phase_fn=np.sin, seed=seed)
    _, z = generate_noisy_signal(n, phase_fn=np.cos, seed=seed + 1)

    m = MultiStreamFilter(MovingAverageFilter(settings['multi_window_size']), channels=2)

    filtered = np.empty((n, 2))
    for i in range(n):
        filtered[i] = m.filter((y[i], z[i]))

    plt.figure(figsize=settings['figure_size'])
    plt.plot(x, y, label='True y')
    plt.plot(x, z, label='True z')
    plt.plot(x, filtered[:, 0], '--', label='MAvg. y')
    plt.plot(x, filtered[:, 1], '--', label='MAvg. z')
    plt.xlim(0, n)
    plt.title('Multi-Filtering Example')
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()

    plt.savefig(output_path, dpi=settings['dpi'])
    plt.close()
    print(f"[INFO] グラフを保存しました: {output_path}")

    return {'x': x, 'input': np.column_stack([y, z]), 'filtered': filtered}


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='フィルター出力の可視化')
    parser.add_argument('--mode', choices=['basic', 'highlowpass', 'multi'], default='basic',
                        help='可視化するフィルター (default: basic)')
    parser.add_argument('--samples', type=int, default=None,
                        help='サンプル数（指定しない場合は設定値）')
    parser.add_argument('--output', default=None,
                        help='画像の保存先')
    parser.add_argument('--seed', type=int, default=None,
                        help='乱数シード')

    args = parser.parse_args()

    if args.samples is not None and args.samples < 1:
        print(f"[ERROR] サンプル数が無効です: {args.samples}")
        sys.exit(1)

    if args.mode == 'basic':
        visualize_basic(args.samples, args.output or 'basic.png', args.seed)
    elif args.mode == 'highlowpass':
        visualize_high_low_pass(args.samples, args.output or 'highlowpass.png', args.seed)
    else:
        visualize_multi_stream(args.samples, args.output or 'multi.png', args.seed)
