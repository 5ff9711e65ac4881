# app/domains/news/routers.py

"""
'news' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- `POST /latestNews/create`
- `GET /latestNews/get?limit=3&page=1` (활성 소식만)
- `PUT /latestNews/update/{id}`
- `DELETE /latestNews/delete/{id}`
"""

from app.core.resource import ResourceRouter

from . import crud as news_crud
from . import schemas as news_schemas

latest_news = ResourceRouter(
    crud=news_crud.latest_news,
    read_schema=news_schemas.LatestNewsRead,
    create_schema=news_schemas.LatestNewsCreate,
    update_schema=news_schemas.LatestNewsUpdate,
    label="News",
    default_limit=3,
    tags=["Latest News (최신 소식)"],
)

router = latest_news.router
