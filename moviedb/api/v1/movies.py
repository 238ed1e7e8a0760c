# moviedb/api/v1/movies.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from ...api.deps import get_movie_service
from ...schemas.movie import Movie, MovieCreate, MovieUpdate
from ...services.movie_service import MovieService
from ...services.results import NotFound, ValidationFailed
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["movies"])


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/movies", response_model=List[Movie])
async def list_movies(service: MovieService = Depends(get_movie_service)):
    """Get all movies"""
    movies = await service.list_movies()
    logger.info(f"Found {len(movies)} movies")
    return movies


@router.get(
    "/movies/{movie_id}",
    response_model=Movie,
    responses={404: {"description": "Movie not found"}},
)
async def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get single movie by ID"""
    movie = await service.get_movie(movie_id)
    if movie is None:
        return _not_found()
    return movie


@router.post(
    "/movie",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation failed"}},
)
async def create_movie(
    movie_in: MovieCreate,
    response: Response,
    service: MovieService = Depends(get_movie_service),
):
    """Create new movie"""
    outcome = await service.create_movie(movie_in)
    if isinstance(outcome, ValidationFailed):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)

    movie = outcome.value
    response.headers["Location"] = f"/movie/{movie.id}"
    return movie


@router.put(
    "/movie/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"description": "Validation failed"}, 404: {"description": "Movie not found"}},
)
async def update_movie(
    movie_id: int,
    movie_in: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
):
    """Replace every field of a movie"""
    outcome = await service.update_movie(movie_id, movie_in)
    if isinstance(outcome, NotFound):
        return _not_found()
    if isinstance(outcome, ValidationFailed):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/movie/{movie_id}", responses={404: {"description": "Movie not found"}})
async def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Delete movie"""
    outcome = await service.delete_movie(movie_id)
    if isinstance(outcome, NotFound):
        return _not_found()
    return Response(status_code=status.HTTP_200_OK)
