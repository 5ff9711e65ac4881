# app/domains/news/crud.py

"""
'news' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from app.core.crud_base import CRUDBase
from app.domains.news import models as news_models
from app.domains.news import schemas as news_schemas


class CRUDLatestNews(CRUDBase[news_models.LatestNews, news_schemas.LatestNewsCreate, news_schemas.LatestNewsUpdate]):
    def __init__(self):
        super().__init__(news_models.LatestNews)


# CRUD 인스턴스 생성
latest_news = CRUDLatestNews()
