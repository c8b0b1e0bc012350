"""session/storage.py - 基于JSON文件的键值存储"""
import json
import logging
import os

logger = logging.getLogger(__name__)


class JsonStorage:
    """把整个存储区保存为一个JSON对象；get/set 语义与浏览器本地存储一致"""

    def __init__(self, path):
        self.path = os.path.expanduser(str(path))

    def _read_all(self):
        """读取整个存储区；文件不存在或损坏时视为空"""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read state from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring non-object state in {self.path}")
            return {}
        return data

    def get(self, keys):
        """
        Args:
            keys: 单个键或键列表
        Returns:
            仅包含已存在键的字典
        """
        if isinstance(keys, str):
            keys = [keys]
        data = self._read_all()
        return {k: data[k] for k in keys if k in data}

    def set(self, mapping):
        """合并写入；写入失败直接抛出"""
        data = self._read_all()
        data.update(mapping)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + '.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)
        logger.debug(f"State written to {self.path}")
