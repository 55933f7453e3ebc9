from django.urls import path

import simulacao.api.views as simulacao_views

urlpatterns = [
    path('bancos/', simulacao_views.BancosAPIView.as_view(), name='bancos'),
    path(
        'parse-contratos/',
        simulacao_views.ParseContratosAPIView.as_view(),
        name='parse_contratos',
    ),
    path('taxas/', simulacao_views.TaxasAPIView.as_view(), name='taxas'),
    path(
        'simular-oferta/',
        simulacao_views.SimularOfertaAPIView.as_view(),
        name='simular_oferta',
    ),
    path(
        'simular-margem/',
        simulacao_views.SimularMargemAPIView.as_view(),
        name='simular_margem',
    ),
]
