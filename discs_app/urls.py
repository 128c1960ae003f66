from django.urls import path

from discs_app import views

urlpatterns = [
    path("api/lookup/reference/<str:reference>/", views.lookup_by_reference, name="lookup_by_reference"),
    path("api/lookup/<str:upc>/", views.lookup_by_upc, name="lookup_by_upc"),
    path("api/collection/", views.collection, name="collection"),
    path("api/collection/<int:laserdisc_id>/", views.laserdisc_detail, name="laserdisc_detail"),
    path("api/collection/<int:laserdisc_id>/watched/", views.toggle_watched, name="toggle_watched"),
    path("api/random-unwatched/", views.random_unwatched, name="random_unwatched"),
]
