'''
Author: Ryuk
Date: 2026-02-15 16:27:15
LastEditors: Ryuk
LastEditTime: 2026-03-06 11:48:27
Description: First create
'''


class BaseNoiseEstimator:
    """
    噪声估计基类
    """

    def __init__(self):
        pass

    def estimate_noise(self, frame_psd, is_speech=False):
        """
        估计噪声的抽象方法

        参数:
            frame_psd (array-like): 当前帧的功率谱
            is_speech (bool): 当前帧是否判为语音

        返回:
            noise_psd (array-like): 估计的噪声功率谱
        """
        raise NotImplementedError("子类必须实现 estimate_noise 方法")



class BaseSpectralGainEstimator:
    """
    谱增益计算基类
    """

    def __init__(self):
        pass

    def compute_gain(self, gammak, ksi):
        """
        计算谱增益的抽象方法

        参数:
            gammak (array-like): 验后信噪比
            ksi (array-like): 验前信噪比

        返回:
            gain (array-like): 计算得到的谱增益
        """
        raise NotImplementedError("子类必须实现 compute_gain 方法")



class BaseDenoiser:
    """
    组合降噪算法基类
    """

    def __init__(self, noise_estimator: BaseNoiseEstimator, spectral_gain: BaseSpectralGainEstimator):
        """
        初始化降噪算法

        参数:
            noise_estimator (BaseNoiseEstimator): 噪声估计器实例
            spectral_gain (BaseSpectralGainEstimator): 谱增益计算器实例
        """
        self.noise_estimator = noise_estimator
        self.spectral_gain = spectral_gain

    def denoise(self, signal):
        """
        执行降噪的主方法

        参数:
            signal (array-like): 输入信号

        返回:
            denoised_signal (array-like): 降噪后的信号
        """
        return self.process(signal)

    def process(self, signal):
        raise NotImplementedError("子类必须实现 process 方法")

    def _apply_gain(self, spectrum, gain):
        """
        应用谱增益到复数谱上（可被子类重写）
        """
        # 默认实现为逐元素相乘，相位保持不变
        return spectrum * gain
