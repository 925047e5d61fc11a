"""
稀缺资源调度扩展器

基于FastAPI的Kubernetes调度扩展服务，为核心调度器提供过滤、打分和绑定回调，
对请求稀缺资源的Pod按照最差适配(worst-fit)策略集中放置，减少资源碎片。
"""

__version__ = "1.0.0"
__description__ = "稀缺资源调度扩展器是一个基于FastAPI的Kubernetes调度扩展服务"
__author__ = "Scheduler Extender Team"
