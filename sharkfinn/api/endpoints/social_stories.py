from typing import List, Optional

from fastapi import APIRouter, Depends, status

from sharkfinn.exceptions import ValidationError
from sharkfinn.schemas.social_stories import SocialStoryCreate, SocialStoryResponse
from sharkfinn.utils.deps import Repos, require_store

router = APIRouter()


@router.get(
    "", response_model=List[SocialStoryResponse], response_model_exclude_unset=True
)
async def get_social_stories(repositories: Repos):
    rows = await repositories.social_stories.list()
    return [SocialStoryResponse(**row) for row in rows]


@router.post(
    "",
    response_model=SocialStoryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_store)],
)
async def create_social_story(
    repositories: Repos, story_data: Optional[SocialStoryCreate] = None
):
    story_data = story_data or SocialStoryCreate()
    if not story_data.title or not story_data.body:
        raise ValidationError("title and body required")

    row = await repositories.social_stories.create(story_data.title, story_data.body)
    return SocialStoryResponse(**row)
