"""AI 资讯日报：把每日 JSON 数据渲染成静态 HTML 页面"""

__version__ = "0.1.0"
