from django.contrib import admin
from django.urls import include, path

admin.autodiscover()
admin.site.site_header = 'Simulador de portabilidade'
admin.site.index_title = 'Administração'
admin.site.site_title = 'Simulador de portabilidade'

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('simulacao.urls')),
]
